from __future__ import annotations
from typing import Dict, Iterator, List, Tuple

from klotski_core.state import BoardState
from .errors import MissingRecordError

NO_PARENT = -1

Record = Tuple[int, int]


class VisitedTable:
    """Discovered states with their discovery id and the id of their parent.

    Ids are dense, assigned in discovery order; records are never changed
    once written. The root gets id 0 and parent NO_PARENT.
    """
    def __init__(self, root: BoardState) -> None:
        self._records: Dict[BoardState, Record] = {root: (0, NO_PARENT)}
        self._states: List[BoardState] = [root]

    def add(self, state: BoardState, parent_id: int) -> int:
        """Records a newly discovered state, returns its id."""
        if state in self._records:
            raise ValueError("state already recorded")
        new_id = len(self._states)
        self._records[state] = (new_id, parent_id)
        self._states.append(state)
        return new_id

    def record(self, state: BoardState) -> Record:
        try:
            return self._records[state]
        except KeyError:
            raise MissingRecordError("state was never discovered by this search") from None

    def state(self, state_id: int) -> BoardState:
        return self._states[state_id]

    def path_to(self, state: BoardState) -> List[BoardState]:
        """Walks parent ids back to the root and returns root -> state."""
        path = [state]
        _, parent = self.record(state)
        while parent != NO_PARENT:
            cur = self._states[parent]
            path.append(cur)
            _, parent = self._records[cur]
        path.reverse()
        return path

    def __contains__(self, state: object) -> bool:
        return state in self._records

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[BoardState]:
        return iter(self._states)
