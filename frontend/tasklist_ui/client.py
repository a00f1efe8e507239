# frontend/tasklist_ui/client.py
import os
from typing import Optional

import requests

API = os.getenv("API_URL", "http://localhost:8000/api")


class TasksClient:
    """Thin requests wrapper over the /tasks endpoints. Non-2xx responses raise."""

    def __init__(self, base_url: str = API, session: Optional[requests.Session] = None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        r = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        r.raise_for_status()
        return r

    def health(self) -> dict:
        return self._request("GET", "/health").json()

    def list_tasks(self, is_completed: Optional[bool] = None, sort_descending: bool = False) -> list[dict]:
        params = {"sortDescending": str(sort_descending).lower()}
        if is_completed is not None:
            params["isCompleted"] = str(is_completed).lower()
        return self._request("GET", "/tasks", params=params).json()

    def get_task(self, task_id: int) -> dict:
        return self._request("GET", f"/tasks/{task_id}").json()

    def create_task(self, task: dict) -> dict:
        return self._request("POST", "/tasks", json=task).json()

    def update_task(self, task: dict) -> None:
        self._request("PUT", f"/tasks/{task['id']}", json=task)

    def delete_task(self, task_id: int) -> None:
        self._request("DELETE", f"/tasks/{task_id}")


if __name__ == "__main__":
    c = TasksClient()
    print("--- Testing TodoList backend ---")
    print("Health:", c.health())
    created = c.create_task({"title": "Try the client", "description": "requests-based smoke run"})
    print("Create task:", created)
    print("List tasks:", c.list_tasks())
    print("Pending only:", c.list_tasks(is_completed=False, sort_descending=True))
    c.delete_task(created["id"])
    print("Deleted task", created["id"])
