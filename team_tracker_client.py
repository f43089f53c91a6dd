"""Team Tracker API client.

A thin wrapper around the ``/api/v1`` routes of the Team Tracker API
built on the ``requests`` library.  Every public method returns a
tuple ``(data, error)``: on success ``error`` is ``None``; on failure
``data`` is ``None`` (or an empty list for the list methods) and
``error`` is a dictionary with the keys ``status_code`` and
``message``.  The message is taken from the ``message`` field of the
API's error body when present.

Example::

    client = TeamTrackerClient(base_url="http://localhost:3000")
    people, error = client.list_people()
    result, error = client.create_task({"title": "Write docs",
                                        "description": "README",
                                        "projectId": 1})
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TeamTrackerClient:
    """Client for the people, projects and tasks collections."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Server root, e.g. ``http://localhost:3000``.
            api_prefix: Version prefix prepended to every path.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/people/1``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # People
    # ------------------------------------------------------------------
    def list_people(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/people")

    def get_person(self, person_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/people/{person_id}")

    def create_person(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a person from ``{"name", "email", "role"}``.

        On success ``data`` is ``{"message": ..., "id": <new id>}``.
        """
        return self._request("POST", "/people", json_body=payload)

    def update_person(self, person_id: int, role: Optional[str] = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        body = {"role": role} if role is not None else {}
        return self._request("PUT", f"/people/{person_id}", json_body=body)

    def delete_person(self, person_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", f"/people/{person_id}")

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    def list_projects(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/projects")

    def get_project(self, project_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/projects/{project_id}")

    def create_project(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/projects", json_body=payload)

    def update_project(self, project_id: int, name: Optional[str] = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        body = {"name": name} if name is not None else {}
        return self._request("PUT", f"/projects/{project_id}", json_body=body)

    def delete_project(self, project_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", f"/projects/{project_id}")

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------
    def list_tasks(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/tasks")

    def get_task(self, task_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/tasks/{task_id}")

    def create_task(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a task from ``{"title", "description", "projectId"}``.

        ``assignedTo`` may be included; a ``status`` key is ignored by
        the server.
        """
        return self._request("POST", "/tasks", json_body=payload)

    def update_task(self, task_id: int, status: Optional[str] = None) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        body = {"status": status} if status is not None else {}
        return self._request("PUT", f"/tasks/{task_id}", json_body=body)

    def delete_task(self, task_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("DELETE", f"/tasks/{task_id}")
