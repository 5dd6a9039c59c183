"""aws-cred - Export AWS credentials from the SDK provider chain into your shell."""

__version__ = "1.0.0"
__author__ = "AgentGino"
__email__ = "himakar@qwik.tools"

from .exports import export_credentials
from .expiry import get_expiry
from .shell import clear_statements

__all__ = ["export_credentials", "get_expiry", "clear_statements"]
