# data/light_stats.py

LIGHT_STATS = {
    "sun": {
        "color": (253, 184, 19),
        "radius": 5,
        "ray_count": 1440,
    },
    "dense": {
        "color": (253, 184, 19),
        "radius": 5,
        "ray_count": 46080,
    },
}
