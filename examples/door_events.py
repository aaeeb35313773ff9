"""Example of a host object emitting events through the emitter package."""

from __future__ import annotations

import logging

from emitter import Emittable, Emitter, EmitterConfig
from emitter.diagnostics import render_table, run_checklist


class Door(Emittable):
    def __init__(self, name: str, emitter: Emitter | None = None) -> None:
        super().__init__(emitter=emitter)
        self.name = name

    def open(self) -> None:
        self.emit("open", self.name)

    def close(self) -> None:
        self.emit("close", self.name)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    door = Door("front", Emitter(EmitterConfig.from_env()))
    door.on("open", lambda name: print(f"{name} door opened"))
    door.once("close", lambda name: print(f"{name} door closed for the first time"))

    door.open()
    door.close()
    door.close()

    render_table(door.emitter)
    for issue in run_checklist(door.emitter):
        print(f"[{issue.severity.upper()}] {issue.message}")


if __name__ == "__main__":
    main()
