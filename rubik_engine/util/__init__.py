from rubik_engine.util.serialization import (
    from_json,
    from_structured,
    print_cube,
    to_json,
    to_structured,
)

__all__ = ["from_json", "from_structured", "print_cube", "to_json", "to_structured"]
