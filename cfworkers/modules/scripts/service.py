"""Worker script upload, download, listing and deletion."""

from __future__ import annotations

import logging

from cfworkers.modules.bindings.multipart import format_multipart_body
from cfworkers.modules.common.routing import (
    resolve_script_mode,
    script_path,
    scripts_collection_path,
)
from cfworkers.modules.common.service import WorkersService

from .models import (
    WorkerListResponse,
    WorkerRequestParams,
    WorkerScript,
    WorkerScriptParams,
    WorkerScriptResponse,
)

logger = logging.getLogger(__name__)

JAVASCRIPT_CONTENT_TYPE = "application/javascript"


class WorkerScriptService(WorkersService):
    """Script operations against either endpoint family."""

    def _script_path(self, params: WorkerRequestParams) -> str:
        mode = resolve_script_mode(params.script_name, self.account_id)
        return script_path(
            mode,
            zone_id=params.zone_id,
            script_name=params.script_name,
            account_id=self.account_id,
        )

    def delete_worker(self, params: WorkerRequestParams) -> WorkerScriptResponse:
        path = self._script_path(params)
        logger.info("Deleting worker script at %s", path)
        res = self._request("DELETE", path)
        return self._decode(WorkerScriptResponse, res)

    def download_worker(self, params: WorkerRequestParams) -> WorkerScriptResponse:
        """Fetch the raw script source; the endpoint returns it without an envelope."""
        path = self._script_path(params)
        res = self._request("GET", path)
        return WorkerScriptResponse(
            success=True,
            result=WorkerScript(script=res.decode("utf-8", errors="replace")),
        )

    def list_worker_scripts(self) -> WorkerListResponse:
        path = scripts_collection_path(self.account_id)
        res = self._request("GET", path)
        return self._decode(WorkerListResponse, res)

    def upload_worker(self, params: WorkerRequestParams, script: str) -> WorkerScriptResponse:
        path = self._script_path(params)
        return self._upload(path, JAVASCRIPT_CONTENT_TYPE, script.encode("utf-8"))

    def upload_worker_with_bindings(
        self,
        params: WorkerRequestParams,
        data: WorkerScriptParams,
    ) -> WorkerScriptResponse:
        path = self._script_path(params)
        content_type, body = format_multipart_body(data.script, data.bindings)
        return self._upload(path, content_type, body)

    def _upload(self, path: str, content_type: str, body: bytes) -> WorkerScriptResponse:
        logger.info("Uploading worker script to %s (%d bytes)", path, len(body))
        res = self._request_with_headers("PUT", path, body, {"Content-Type": content_type})
        return self._decode(WorkerScriptResponse, res)
