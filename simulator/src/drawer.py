import pygame
from consts import OVERLAY_COLOR


def draw_light_sources(screen, lights):
    for light in lights:
        # Extent of the light
        extent = light.extent
        if extent.width >= 1 and extent.height >= 1:
            rect = pygame.Rect(int(extent.left), int(extent.top), int(extent.width), int(extent.height))
            pygame.draw.ellipse(screen, OVERLAY_COLOR, rect, 1)

        # Scanned radius
        if light.radius >= 1:
            pygame.draw.circle(screen, light.color, (int(light.x), int(light.y)), int(light.radius), 1)

        # Centre of the light
        pygame.draw.circle(screen, OVERLAY_COLOR, (int(light.x), int(light.y)), 3)
