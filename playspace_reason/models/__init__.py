from playspace_reason.models.analysis import AnalyzeRequest, AnalyzeResponse

__all__ = ["AnalyzeRequest", "AnalyzeResponse"]
