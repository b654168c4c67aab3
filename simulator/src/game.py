import pygame
from consts import HEIGHT, WIDTH

CAPTION = "Per-pixel Light Simulator"

def init_pygame(size=(WIDTH, HEIGHT), caption=CAPTION):
	pygame.init()
	screen = pygame.display.set_mode(size)
	pygame.display.set_caption(caption)
	font = pygame.font.SysFont(None, 20)
	return (screen, font)
