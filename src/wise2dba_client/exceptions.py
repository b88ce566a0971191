"""Custom exceptions for the Wise2DBA command-line client."""


class ClientError(Exception):
    """Base exception for all client errors."""
    pass


class MissingOptionValueError(ClientError):
    """Exception raised when an option expecting a value is the last token."""
    
    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Option {option} requires a value")


class ConfigurationError(ClientError):
    """Exception raised for configuration errors."""
    
    def __init__(self, message: str, config_file: str = None, parameter: str = None):
        self.config_file = config_file
        self.parameter = parameter
        
        if config_file is not None:
            message = f"Configuration error in {config_file}: {message}"
        if parameter is not None:
            message = f"{message} (parameter: {parameter})"
            
        super().__init__(message)


class ServiceError(ClientError):
    """Exception raised when the web service rejects a request."""
    
    def __init__(self, message: str, status_code: int = None, url: str = None):
        self.status_code = status_code
        self.url = url
        
        if url is not None:
            message = f"Request to {url} failed: {message}"
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
            
        super().__init__(message)


class JobFailedError(ClientError):
    """Exception raised when a job ends in a state other than FINISHED."""
    
    def __init__(self, job_id: str, status: str):
        self.job_id = job_id
        self.status = status
        super().__init__(f"Job {job_id} ended with status {status}")
