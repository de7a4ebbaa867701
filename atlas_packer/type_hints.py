# Shared type hints

from typing import Any, Dict, Hashable, Tuple

Size = Tuple[int, int]
Point = Tuple[int, int]
Delta = Tuple[int, int]

RectId = Hashable

# {key: {'gfx': {'size': (w, h), 'fit': {...}}}}
ImagesDict = Dict[Any, Dict[str, Dict[str, Any]]]
