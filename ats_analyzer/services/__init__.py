from .analysis_service import ProgressCallback, run_analysis, validate_request

__all__ = ["ProgressCallback", "run_analysis", "validate_request"]
