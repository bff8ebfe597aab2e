"""Depth-first mirroring of a local tree onto a remote folder hierarchy."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from directcloud_uploader.client import DirectCloudClient
from directcloud_uploader.exceptions import FolderCreationError, ListingError, UploadError
from directcloud_uploader.models import ReplicationReport, Session, Step

logger = logging.getLogger(__name__)


class TreeReplicator:
    """Walk a local path and recreate it under a remote node.

    Every step returns a Step. Folder creation and listing failures skip one
    subtree and the walk carries on with siblings. An upload failure aborts
    the whole walk: the first ABORT is returned unchanged through every level
    and replicate() raises its error.

    Entries are processed in the order os.scandir yields them.
    """

    def __init__(self, client: DirectCloudClient, session: Session) -> None:
        self._client = client
        self._session = session
        self.report = ReplicationReport()

    def replicate(self, node: str, local_path: Path | str) -> ReplicationReport:
        """Mirror local_path under node.

        Raises:
            UploadError: If any file upload fails
        """
        step = self.visit(str(node), Path(local_path))
        if step.is_abort and step.error is not None:
            raise step.error
        return self.report

    def visit(self, node: str, local_path: Path) -> Step:
        try:
            with os.scandir(local_path) as it:
                entries = list(it)
        except NotADirectoryError:
            return self._upload(node, local_path)
        except OSError as e:
            error = ListingError(local_path, e)
            logger.warning(str(error))
            self.report.skipped.append((local_path, str(error)))
            return Step.skip(str(error))

        for entry in entries:
            child_path = local_path / entry.name
            if self._is_dir(entry):
                step = self._visit_directory(node, child_path)
            else:
                step = self.visit(node, child_path)
            if step.is_abort:
                return step
        return Step.proceed()

    def _visit_directory(self, node: str, local_path: Path) -> Step:
        try:
            child_node = self._client.create_folder(self._session, node, local_path.name)
        except FolderCreationError as e:
            logger.warning(str(e))
            self.report.skipped.append((local_path, str(e)))
            return Step.skip(str(e))

        self.report.folders_created.append((local_path.name, child_node))
        return self.visit(child_node, local_path)

    def _upload(self, node: str, local_path: Path) -> Step:
        try:
            self._client.upload_file(self._session, node, local_path)
        except UploadError as e:
            return Step.abort(e)
        self.report.files_uploaded.append(local_path)
        return Step.proceed()

    @staticmethod
    def _is_dir(entry: os.DirEntry) -> bool:  # type: ignore[type-arg]
        try:
            return entry.is_dir(follow_symlinks=False)
        except OSError:
            return False


def replicate(
    client: DirectCloudClient, session: Session, node: str, local_path: Path | str
) -> ReplicationReport:
    """Convenience wrapper around TreeReplicator.replicate()."""
    return TreeReplicator(client, session).replicate(node, local_path)
