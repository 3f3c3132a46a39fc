from typing import Any, Dict


def init_metrics() -> Dict[str, Any]:
    return {
        'room_attempts': 0,
        'rooms_placed': 0,
        'rooms_rejected': 0,
        'rooms_unfit': 0,
        'regions': 0,
        'mazes': 0,
        'connectors': 0,
        'junctions': 0,
        'extra_junctions': 0,
        'regions_unconnected': 0,
        'dead_ends_removed': 0,
        'prune_passes': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
