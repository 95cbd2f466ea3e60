"""表示用プレゼンター."""
