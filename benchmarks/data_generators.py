"""
Test data generators for lintjson benchmarks.

Creates JSON documents shaped like the inputs a linter integration sees:
- Small and large linter configurations, optionally with comments
- Objects with many members to exercise name lookups
- Deeply nested structures and string-heavy content with escapes
"""

import json
import random
import string
from typing import Any

_ESCAPE_PROBABILITY = 0.3

_OPTIONS = [
    "bitwise",
    "camelcase",
    "curly",
    "eqeqeq",
    "forin",
    "immed",
    "latedef",
    "newcap",
    "noarg",
    "noempty",
    "nonew",
    "plusplus",
    "quotmark",
    "undef",
    "unused",
    "strict",
    "trailing",
]


def generate_test_data(data_type: str, seed: int = 1234) -> str:
    """Generates JSON test data of the given type, reproducible per seed."""
    generators = {
        "small_config": _generate_small_config,
        "commented_config": _generate_commented_config,
        "wide_object": _generate_wide_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(seed))


def _generate_small_config(rng: random.Random) -> str:
    """Generates a small linter configuration (< 1KB)."""
    data: dict[str, Any] = {
        name: rng.choice([True, False]) for name in _OPTIONS
    }
    data["indent"] = rng.choice([2, 4])
    data["maxlen"] = 120
    data["globals"] = {"jQuery": False, "define": False, "require": False}
    return json.dumps(data, indent=2)


def _generate_commented_config(rng: random.Random) -> str:
    """Generates a linter configuration with line and block comments."""
    lines = ["{", "  /* Enforcing options */"]
    for name in _OPTIONS:
        lines.append(f"  // {_random_string(rng, 30)}")
        lines.append(f'  "{name}": {json.dumps(rng.choice([True, False]))},')
    lines.append("  /* Relaxing options")
    lines.append(f"     {_random_string(rng, 40)} */")
    lines.append('  "indent": 4')
    lines.append("}")
    return "\n".join(lines)


def _generate_wide_object(rng: random.Random) -> str:
    """Generates an object with 1000 members, beyond the hash index."""
    data = {
        f"member_{i}_{_random_string(rng, 6)}": rng.randint(-1000, 1000)
        for i in range(1000)
    }
    return json.dumps(data)


def _generate_mixed_array(rng: random.Random) -> str:
    """Generates a large array with mixed data types."""
    array: list[Any] = []

    for i in range(200):
        choice = rng.randint(1, 6)
        if choice == 1:
            array.append(rng.randint(-1000, 1000))
        elif choice == 2:
            array.append(round(rng.uniform(-100.0, 100.0), 3))
        elif choice == 3:
            array.append(_random_string(rng, rng.randint(5, 30)))
        elif choice == 4:
            array.append(rng.choice([True, False]))
        elif choice == 5:
            array.append(None)
        else:
            array.append(
                {
                    "index": i,
                    "value": _random_string(rng, 10),
                    "score": round(rng.uniform(0, 100), 2),
                }
            )

    return json.dumps(array)


def _generate_nested_structure(rng: random.Random) -> str:
    """Generates a deeply nested JSON structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}

        return {
            "level": depth,
            "data": _random_string(rng, 15),
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return json.dumps(create_nested_dict(7))


def _generate_string_heavy(rng: random.Random) -> str:
    """Generates JSON with many string escape sequences."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(
                    rng.choice(
                        ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\t"]
                    )
                )
            else:
                chars.append(
                    rng.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    strings = ", ".join(f'"{create_escaped_string()}"' for _ in range(100))
    unicode = ", ".join(
        f'"Unicode: \\u{rng.randint(0x00A0, 0xD7FF):04x}"' for _ in range(50)
    )
    return f'{{"strings": [{strings}], "unicode": [{unicode}]}}'


def _random_string(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
