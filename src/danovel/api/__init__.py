"""HTTP API for the DaNovel application."""
