from __future__ import annotations

from hoststats.commands.runner import CommandResult


class CannedCommandRunner:
    """Replays fixed command output instead of touching the host.

    Values may be plain stdout strings or full ``CommandResult`` objects;
    unknown commands fail.
    """

    def __init__(self, outputs: dict[str, str | CommandResult] | None = None) -> None:
        self.outputs: dict[str, str | CommandResult] = dict(outputs or {})
        self.calls: list[str] = []

    async def run(self, command: str) -> CommandResult:
        self.calls.append(command)
        out = self.outputs.get(command)
        if out is None:
            return CommandResult(ok=False, error=f"no canned output for {command!r}")
        if isinstance(out, CommandResult):
            return out
        return CommandResult(stdout=out)


# ── macOS output builders ───────────────────────────


def vm_stat_text(
    free: int = 12000,
    inactive: int = 180000,
    wired: int = 250000,
    purgeable: int = 9000,
    anonymous: int = 600000,
    compressed: int = 150000,
) -> str:
    """``vm_stat`` output with the given page counts on their usual lines."""
    rows = [
        ("Pages free", free),
        ("Pages active", 620000),
        ("Pages inactive", inactive),
        ("Pages speculative", 4000),
        ("Pages throttled", 0),
        ("Pages wired down", wired),
        ("Pages purgeable", purgeable),
        ('"Translation faults"', 912345678),
        ("Pages copy-on-write", 23456789),
        ("Pages zero filled", 345678901),
        ("Pages reactivated", 4567890),
        ("Pages purged", 567890),
        ("File-backed pages", 210000),
        ("Anonymous pages", anonymous),
        ("Pages stored in compressor", 420000),
        ("Pages occupied by compressor", compressed),
        ("Decompressions", 3456789),
        ("Compressions", 5678901),
        ("Pageins", 6789012),
        ("Pageouts", 78901),
        ("Swapins", 0),
        ("Swapouts", 0),
    ]
    lines = ["Mach Virtual Memory Statistics: (page size of 4096 bytes)"]
    lines += [f"{(name + ':'):<40}{count:>12}." for name, count in rows]
    return "\n".join(lines) + "\n"


def top_cpu_text(user: float = 12.3, system: float = 4.5, idle: float = 83.2) -> str:
    return f"CPU usage: {user:.2f}% user, {system:.2f}% sys, {idle:.2f}% idle \n"


def nettop_text(rows: list[tuple[int, int]]) -> str:
    """``nettop -x -l 1`` style output; each row is (bytes_in, bytes_out)."""
    lines = [
        "time     interface  state        bytes_in  bytes_out",
    ]
    for i, (bytes_in, bytes_out) in enumerate(rows):
        lines.append(
            f"12:00:00.{i:06d} tcp4 192.168.1.{i + 2}:{52000 + i}<->17.57.146.{i + 10}:443"
            f" en0 Established 1.{25 + i} {bytes_in} {bytes_out}"
        )
    return "\n".join(lines) + "\n"
