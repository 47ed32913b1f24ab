"""ghstatus: read and write GitHub commit statuses from CI."""

__version__ = "0.1.0"
