"""kvcache configuration property classes."""
