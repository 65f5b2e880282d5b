"""In-memory tool groups shared by the registry and protocol tests."""

import asyncio
from typing import Any

from ghl_mcp.tools.base import ToolDescriptor


class FakeGroup:
    """Tool group that echoes its name and arguments back."""

    def __init__(self, group_id: str, names: list[str], error: Exception | None = None):
        self._group_id = group_id
        self._names = list(names)
        self._error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    @property
    def group_id(self) -> str:
        return self._group_id

    def list_descriptors(self) -> list[ToolDescriptor]:
        return [ToolDescriptor(n, f"Fake {n}") for n in self._names]

    def handles(self, name: str) -> bool:
        return name in self._names

    async def execute(self, name: str, arguments: dict[str, Any]) -> Any:
        self.calls.append((name, arguments))
        await asyncio.sleep(0)
        if self._error is not None:
            raise self._error
        return {"group": self._group_id, "tool": name, "args": arguments}


class PrefixGroup(FakeGroup):
    """Group whose membership check claims every name with its prefix."""

    def __init__(self, group_id: str, names: list[str], prefix: str):
        super().__init__(group_id, names)
        self._prefix = prefix

    def handles(self, name: str) -> bool:
        return name.startswith(self._prefix)

