class TaskError(Exception):
    """Base class for task store failures the API maps to client errors."""


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class TaskIdMismatchError(TaskError):
    def __init__(self, path_id: int, body_id: int | None):
        super().__init__(f"Task id in body ({body_id}) does not match path id ({path_id})")
        self.path_id = path_id
        self.body_id = body_id
