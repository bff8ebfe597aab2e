"""Top-level run: validate settings, authenticate once, mirror the tree."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from directcloud_uploader.client import DirectCloudClient
from directcloud_uploader.config import load_settings
from directcloud_uploader.models import RunResult
from directcloud_uploader.replicator import TreeReplicator

logger = logging.getLogger(__name__)


def run(
    environ: Mapping[str, str] | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> RunResult:
    """Upload the configured local path to the configured remote node.

    This is the only place errors are caught without being re-raised. Any
    failure, whether configuration, authentication or an upload, ends the run
    with a single error report. Files uploaded before the failure are not
    reported as a partial success.
    """
    try:
        settings = load_settings(environ)
        with DirectCloudClient(settings.endpoint, transport=transport) as client:
            session = client.authenticate(settings.credentials)
            replicator = TreeReplicator(client, session)
            report = replicator.replicate(settings.node, settings.file_path)
    except Exception as e:
        logger.error(str(e))
        return RunResult(success=False, error=str(e))

    logger.info(
        f"Finished: {len(report.files_uploaded)} file(s) uploaded, "
        f"{len(report.folders_created)} folder(s) created, "
        f"{len(report.skipped)} path(s) skipped"
    )
    return RunResult(success=True, report=report)
