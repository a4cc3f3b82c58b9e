class NotFoundException(Exception):
    def __init__(self, detail: str = "Object not found"):
        super().__init__(detail)
        self.detail = detail


class ProfileNotFoundException(NotFoundException):
    def __init__(self, user_id: str):
        super().__init__(detail=f"Profile for user {user_id} not found")


class WorkoutNotFoundException(NotFoundException):
    def __init__(self, workout_id: int):
        super().__init__(detail=f"Workout with id={workout_id} not found")


class InvalidSetLogException(ValueError):
    def __init__(self, workout_id: int, item_ids: list[int]):
        super().__init__(f"Workout items {item_ids} do not belong to workout {workout_id}")
        self.workout_id = workout_id
        self.item_ids = item_ids


class CatalogValidationError(ValueError):
    pass
