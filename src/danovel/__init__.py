"""DaNovel Stage: domain core for the DaNovel reading and publishing platform."""

__version__ = "0.1.0"
