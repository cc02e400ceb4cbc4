"""UserPreference domain entity: who the plan is for and what they avoid."""
from typing import List, Optional


class UserPreference:
    def __init__(self, id: str = "default", name: str = "", dislikes: Optional[List[str]] = None,
                 allergies: Optional[List[str]] = None, dietary_goal: Optional[str] = None):
        self.id = id
        self.name = name
        self.dislikes = dislikes[:] if dislikes else []
        self.allergies = allergies[:] if allergies else []
        self.dietary_goal = dietary_goal

    def __str__(self) -> str:
        return f"{self.name or self.id} - dislikes: {', '.join(self.dislikes)} - allergies: {', '.join(self.allergies)}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return UserPreference(
            id=str(d.get("id", "default")),
            name=d.get("name", "") or "",
            dislikes=d.get("dislikes") or [],
            allergies=d.get("allergies") or [],
            dietary_goal=d.get("dietaryGoal"),
        )

    def to_dict(self):
        data = {
            "id": self.id,
            "name": self.name,
            "dislikes": self.dislikes,
            "allergies": self.allergies,
        }
        if self.dietary_goal:
            data["dietaryGoal"] = self.dietary_goal
        return data
