"""Navigation resource tracking which user is shown and whether it is loading."""
from dataclasses import dataclass


@dataclass
class NavigationState:
    """Singleton component; ``is_loading`` is the only re-entrancy guard."""
    current_user_id: int = 1
    total_users: int = 4
    is_loading: bool = False

    def is_valid_user(self, user_id: int) -> bool:
        return 1 <= user_id <= self.total_users

    def next_user_id(self) -> int:
        nxt = self.current_user_id + 1
        if nxt > self.total_users:
            nxt = 1
        return nxt
