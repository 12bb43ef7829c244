from seatmon.infra.http.source import HttpDocumentSource

__all__ = ["HttpDocumentSource"]
