"""kubereport - Render Kubernetes manifest validation results as console text, JSON or TAP"""

from importlib import metadata

from kubereport.reporters import get_output_manager
from kubereport.results import SchemaError, ValidationResult, ValidationStatus, get_status

__version__ = metadata.version("kubereport")
__all__ = ["SchemaError", "ValidationResult", "ValidationStatus", "__version__", "get_output_manager", "get_status"]
