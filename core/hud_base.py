import pygame


class HudElement:
    """Base class for all HUD elements.

    position: (x, y) on screen.
    size: (width, height) of this element.
    """

    def __init__(self, position=(0, 0), size=(0, 0)):
        self.rel_pos = pygame.Vector2(position)
        self.size = pygame.Vector2(size)
        self.visible = True

    def draw(self, screen):
        pass


class HudText(HudElement):
    """A text label, optionally bound to a data source.

    text_source: callable returning a string, OR None to use static text.
    text:        static text (used when text_source is None).
    """

    def __init__(self, position=(0, 0), text="", text_source=None,
                 color=(255, 255, 255), font_size=24):
        self._font = pygame.font.SysFont(None, font_size)
        # Estimate size from static text for layout purposes
        surface = self._font.render(text or "X", True, color)
        super().__init__(position, (surface.get_width(), surface.get_height()))
        self.text = text
        self.text_source = text_source
        self.color = color

    def current_text(self):
        return self.text_source() if self.text_source else self.text

    def draw(self, screen):
        if not self.visible:
            return
        surface = self._font.render(self.current_text(), True, self.color)
        screen.blit(surface, self.rel_pos)


class HudLayer:
    """Top-level manager that holds elements and draws them all."""

    def __init__(self):
        self.elements = []

    def add(self, element):
        self.elements.append(element)
        return element

    def draw(self, screen):
        for element in self.elements:
            element.draw(screen)
