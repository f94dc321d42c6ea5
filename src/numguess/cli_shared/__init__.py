# topmark:header:start
#
#   project      : NumGuess
#   file         : __init__.py
#   file_relpath : src/numguess/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent building blocks shared by the CLI and the game layer."""
