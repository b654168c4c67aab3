import json

from light_source import Light

REQUIRED_KEYS = ("x", "y", "radius", "color")


def light_from_dict(data: dict, index: int = 0) -> Light:
    for key in REQUIRED_KEYS:
        if key not in data:
            raise ValueError(f"Light {index} is missing '{key}'")

    color = data["color"]
    if len(color) != 3:
        raise ValueError(f"Light {index} color must have 3 channels, got {len(color)}")

    return Light(
        x=data["x"],
        y=data["y"],
        radius=data["radius"],
        color=tuple(int(c) for c in color),
        brightness=data.get("brightness", 0.0),
    )


def light_to_dict(light: Light) -> dict:
    return {
        "x": light.x,
        "y": light.y,
        "radius": light.radius,
        "color": [light.color.r, light.color.g, light.color.b],
        "brightness": light.brightness,
    }


def load_lights(path) -> list[Light]:
    with open(path, "r", encoding="utf-8") as f:
        scene = json.load(f)

    return [light_from_dict(entry, i) for i, entry in enumerate(scene.get("lights", []))]


def save_lights(lights: list[Light], path):
    payload = {"lights": [light_to_dict(light) for light in lights]}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
