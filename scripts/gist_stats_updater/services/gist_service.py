#------------------------------------------------------------
#                       gist_service.py
#          Locates, renames, and rewrites the single
#                  file of the target gist.

import sys
from typing import Dict, Optional
import requests
from ..config import (
    ERROR_TEMPLATE,
    GIST_ENDPOINT_TEMPLATE,
    GIST_LOCATE_FAILED_TEMPLATE,
    GIST_RENAMED_TEMPLATE,
    GIST_UPDATE_FAILED_TEMPLATE,
    GIST_UPDATED_MESSAGE,
    GITHUB_API_ACCEPT_HEADER,
    GITHUB_API_BASE_URL,
    GITHUB_AUTH_TEMPLATE,
    INFO_TEMPLATE,
    NO_GIST_FILES_MESSAGE,
)
from ..models import RemoteFile, UpdateConfig

class GistError(RuntimeError):
    """Raised when the target gist file cannot be located or renamed."""

class GistNotFoundError(GistError):
    """Raised when the gist holds no file to write."""

class GistService:

    # This function does initialize service state.
    # It stores runtime configuration used by API methods.
    def __init__(self, config: UpdateConfig):
        self.config = config

    # This function does build request headers for Gist API calls.
    # It sends the GitHub JSON media type and a bearer token.
    def headers(self) -> Dict[str, str]:
        return {
            "Accept": GITHUB_API_ACCEPT_HEADER,
            "Authorization": GITHUB_AUTH_TEMPLATE.format(token=self.config.github_token),
        }

    @property
    def gist_url(self) -> str:
        return f"{GITHUB_API_BASE_URL}{GIST_ENDPOINT_TEMPLATE.format(gist_id=self.config.gist_id)}"

    def _patch_files(self, files: Dict[str, dict]) -> None:
        response = requests.patch(
            self.gist_url,
            json={"files": files},
            headers=self.headers(),
            timeout=self.config.request_timeout_seconds,
        )
        response.raise_for_status()

    # This function does fetch the gist and return its target file.
    # The gist is expected to hold exactly one file; the first wins.
    def fetch_target_file(self) -> RemoteFile:
        response = requests.get(self.gist_url, headers=self.headers(), timeout=self.config.request_timeout_seconds)
        response.raise_for_status()
        files = RemoteFile.list_from_gist(response.json())
        if not files:
            raise GistNotFoundError(NO_GIST_FILES_MESSAGE)
        return files[0]

    # This function does rename a gist file while keeping its content.
    # It issues a single PATCH addressed by the old filename.
    def rename_file(self, remote_file: RemoteFile, new_filename: str) -> None:
        self._patch_files({remote_file.filename: {"filename": new_filename, "content": remote_file.content}})
        print(INFO_TEMPLATE.format(message=GIST_RENAMED_TEMPLATE.format(old=remote_file.filename, new=new_filename)))

    # This function does resolve the filename the stats will be written to.
    # It renames the file to the title first when the two differ.
    def locate_target_file(self, title: Optional[str] = None) -> str:
        try:
            remote_file = self.fetch_target_file()
            if title and remote_file.filename != title:
                self.rename_file(remote_file, title)
                return title
            return remote_file.filename
        except GistNotFoundError as exc:
            print(ERROR_TEMPLATE.format(message=GIST_LOCATE_FAILED_TEMPLATE.format(error=exc)), file=sys.stderr)
            raise
        except (requests.RequestException, KeyError, TypeError, ValueError, AttributeError) as exc:
            print(ERROR_TEMPLATE.format(message=GIST_LOCATE_FAILED_TEMPLATE.format(error=exc)), file=sys.stderr)
            raise GistError(str(exc)) from exc

    # This function does replace the content of one gist file.
    # Failures are logged and reported through the return value.
    def update_file_content(self, filename: str, content: str) -> bool:
        try:
            self._patch_files({filename: {"content": content}})
        except requests.RequestException as exc:
            print(ERROR_TEMPLATE.format(message=GIST_UPDATE_FAILED_TEMPLATE.format(error=exc)), file=sys.stderr)
            return False
        print(INFO_TEMPLATE.format(message=GIST_UPDATED_MESSAGE))
        return True
