# hillclimb/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any

Cell = Tuple[int, int]  # (col, row)

@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

@dataclass
class QueryResult:
    status: str                   # "found" | "no_path"
    steps: Optional[int] = None
    path: Optional[List[Cell]] = None   # origin first, anchor last
    origin: Optional[Cell] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.status == "found"
