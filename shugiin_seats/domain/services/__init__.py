"""ドメインサービス."""
