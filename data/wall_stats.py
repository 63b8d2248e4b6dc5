# data/wall_stats.py

WALL_STATS = {
    "wall": {
        "color": (255, 255, 255),
        "width": 1,
    },
    "boundary": {
        "color": (255, 255, 255),
        "width": 1,
    },
}
