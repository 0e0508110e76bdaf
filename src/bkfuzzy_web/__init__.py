"""Flask UI / JSON API on top of bkfuzzy.Engine."""
