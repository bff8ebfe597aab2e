"""DirectCloud Uploader - mirror a local directory tree into DirectCloud-BOX.

Example usage:
    from directcloud_uploader import DirectCloudClient, TreeReplicator, load_settings

    settings = load_settings()
    with DirectCloudClient(settings.endpoint) as client:
        session = client.authenticate(settings.credentials)
        TreeReplicator(client, session).replicate(settings.node, settings.file_path)

Or, with the DIRECTCLOUDBOX_* variables set, simply:
    from directcloud_uploader import run

    result = run()
"""

from directcloud_uploader.classifier import DEFAULT_CONTENT_TYPE, classify, content_type_for
from directcloud_uploader.client import DirectCloudClient
from directcloud_uploader.config import Settings, load_credentials, load_settings
from directcloud_uploader.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DirectCloudError,
    FolderCreationError,
    ListingError,
    UploadError,
)
from directcloud_uploader.models import (
    Credentials,
    ReplicationReport,
    RunResult,
    Session,
    Step,
    StepKind,
)
from directcloud_uploader.replicator import TreeReplicator, replicate
from directcloud_uploader.runner import run

__version__ = "0.1.0"

__all__ = [
    # Main client
    "DirectCloudClient",
    "TreeReplicator",
    "replicate",
    "run",
    # Configuration
    "Settings",
    "load_settings",
    "load_credentials",
    # Content types
    "classify",
    "content_type_for",
    "DEFAULT_CONTENT_TYPE",
    # Models
    "Credentials",
    "Session",
    "Step",
    "StepKind",
    "ReplicationReport",
    "RunResult",
    # Exceptions
    "DirectCloudError",
    "ConfigurationError",
    "AuthenticationError",
    "FolderCreationError",
    "UploadError",
    "ListingError",
]
