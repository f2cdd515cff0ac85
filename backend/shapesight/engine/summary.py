"""Plain-text summary of a detection result."""

from __future__ import annotations

from shapesight.engine.types import DetectionResult


def summarize(result: DetectionResult) -> str:
    lines = [
        f"Processing Time: {result.processing_time_ms:.2f}ms",
        f"Shapes Found: {len(result.shapes)}",
    ]
    if not result.shapes:
        lines.append("No shapes detected.")
        return "\n".join(lines)

    lines.append("Detected Shapes:")
    for shape in result.shapes:
        cx, cy = shape.center
        lines.append(
            f"- {shape.type.value.capitalize()}: "
            f"confidence {shape.confidence * 100:.1f}%, "
            f"center ({cx:.1f}, {cy:.1f}), "
            f"area {shape.area:.1f}px²"
        )
    return "\n".join(lines)
