"""値オブジェクト."""
