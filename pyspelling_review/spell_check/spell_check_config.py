"""Literal strings and names shared by the spell-check workflow.

The checker output markers below mirror what ``pyspelling`` prints for a
failing source. They are matched exactly (after trimming) by the ignore
filter, so keep them in sync with the checker version in use.
"""

# Substring whose presence marks a file as having misspellings
FAILURE_MARKER = "Spelling check failed"

# Banner line printed when a source fails
FAILURE_BANNER = "!!!Spelling check failed!!!"

# Header printed before the list of misspelled tokens
MISSPELLED_HEADER = "Misspelled words:"

# Prefix of the per-source marker line, followed by the file path
SOURCE_MARKER_PREFIX = "<text>"

# Fixed-width separator printed between sources
SEPARATOR_LINE = "-" * 80

# Report layout
REPORT_HEADER = "### Spell Checker found issues"
TABLE_HEADER = "Line | Typo"
TABLE_DIVIDER = "--- | ---"

# External binaries
PYSPELLING_BINARY = "pyspelling"
DICTIONARY_BACKENDS = ("aspell", "hunspell")

CONFIGURATION_ERROR_MESSAGE = "name must be a valid matrix name in your .pyspelling.yml."
