"""得票データ・定数テーブルのインポーター."""
