"""ユースケース."""
