"""Custom exceptions for Amalgam"""


class AmalgamError(Exception):
    """Base exception for all Amalgam errors"""
    pass


class PipelineError(AmalgamError):
    """Error in pipeline execution"""
    def __init__(self, message: str, stage: int = None):
        super().__init__(message)
        self.stage = stage


class StageError(AmalgamError):
    """Error in a specific stage"""
    def __init__(self, stage: int, message: str):
        super().__init__(f"Stage {stage}: {message}")
        self.stage = stage
        self.message = message


class EmptyBatchError(PipelineError):
    """Pipeline invoked without any admitted file"""
    def __init__(self, message: str = "No admitted files to process."):
        super().__init__(message, stage=None)


class AdmissionError(AmalgamError):
    """File rejected before parsing (unsupported type, zero bytes)"""
    def __init__(self, message: str, file_name: str = None):
        super().__init__(message)
        self.file_name = file_name


class FileParseError(AmalgamError):
    """Error parsing file"""
    def __init__(self, message: str, file_path: str = None):
        super().__init__(message)
        self.file_path = file_path


class EmptyResultError(FileParseError):
    """Structurally valid file without any data row"""
    pass
