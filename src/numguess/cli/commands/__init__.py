# topmark:header:start
#
#   project      : NumGuess
#   file         : __init__.py
#   file_relpath : src/numguess/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumGuess CLI subcommands."""
