"""CLIコマンド."""
