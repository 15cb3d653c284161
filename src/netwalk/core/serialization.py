"""
Serializers for puzzle input.

Two formats are registered: ``text``, the native puzzle format, and ``json``,
a document validated against ``PUZZLE_SCHEMA``::

    {"instructions": "LR", "nodes": {"AAA": ["BBB", "CCC"]}}
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Type

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate

from .exceptions import ValidationError
from .models import NODE_ID_PATTERN, Instructions
from .network import Network
from .parsing import PuzzleInput, parse_input

PUZZLE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "instructions": {"type": "string", "pattern": "^[LR]+$"},
        "nodes": {
            "type": "object",
            "propertyNames": {"pattern": f"^{NODE_ID_PATTERN}$"},
            "additionalProperties": {
                "type": "array",
                "items": {"type": "string", "pattern": f"^{NODE_ID_PATTERN}$"},
                "minItems": 2,
                "maxItems": 2,
            },
        },
    },
    "required": ["instructions", "nodes"],
    "additionalProperties": False,
}


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValidationError(f"Input is not valid UTF-8: {e}") from e


class PuzzleSerializer(ABC):
    @abstractmethod
    def serialize(self, puzzle: PuzzleInput) -> bytes:
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> PuzzleInput:
        pass


class TextPuzzleSerializer(PuzzleSerializer):
    def serialize(self, puzzle: PuzzleInput) -> bytes:
        lines = [str(puzzle.instructions), ""]
        lines.extend(str(puzzle.network.get_node(node_id)) for node_id in puzzle.network)
        return ("\n".join(lines) + "\n").encode("utf-8")

    def deserialize(self, data: bytes) -> PuzzleInput:
        return parse_input(_decode(data))


class JSONPuzzleSerializer(PuzzleSerializer):
    def serialize(self, puzzle: PuzzleInput) -> bytes:
        nodes = {}
        for node_id in puzzle.network:
            node = puzzle.network.get_node(node_id)
            nodes[node_id] = [node.left, node.right]
        document = {"instructions": str(puzzle.instructions), "nodes": nodes}
        return json.dumps(document, indent=2).encode("utf-8")

    def deserialize(self, data: bytes) -> PuzzleInput:
        try:
            document = json.loads(_decode(data))
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON input: {e}") from e

        try:
            validate(instance=document, schema=PUZZLE_SCHEMA)
        except JsonSchemaError as e:
            raise ValidationError(f"Puzzle schema validation failed: {e.message}") from e

        network = Network.from_mapping(
            {node_id: (left, right) for node_id, (left, right) in document["nodes"].items()}
        )
        return PuzzleInput(
            instructions=Instructions.from_line(document["instructions"]),
            network=network,
        )


class SerializationRegistry:
    _serializers: Dict[str, Type[PuzzleSerializer]] = {}

    @classmethod
    def register(cls, format_name: str, serializer: Type[PuzzleSerializer]):
        cls._serializers[format_name] = serializer

    @classmethod
    def get_serializer(cls, format_name: str) -> PuzzleSerializer:
        if format_name not in cls._serializers:
            raise ValueError(f"No serializer registered for format: {format_name}")
        return cls._serializers[format_name]()

    @classmethod
    def formats(cls):
        return sorted(cls._serializers)


SerializationRegistry.register("text", TextPuzzleSerializer)
SerializationRegistry.register("json", JSONPuzzleSerializer)
