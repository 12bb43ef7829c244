from seatmon.infra.query.jmespath import JmesPathQuery

__all__ = ["JmesPathQuery"]
