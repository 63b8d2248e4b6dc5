from scenes.default_scene import DefaultScene
from scenes.scene_base import SceneBase, SceneFormatError

__all__ = ["DefaultScene", "SceneBase", "SceneFormatError"]
