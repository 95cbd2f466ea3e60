"""Domain layer: 得票データ・議席集計の値オブジェクトと配分ロジック."""
