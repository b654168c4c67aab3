import argparse

import numpy as np
import pygame
from consts import (BG_COLOR, DEFAULT_BRIGHTNESS, DEFAULT_LIGHT_RADIUS, FONT_COLOR, FPS, HEIGHT,
                    NUM_RANDOM_LIGHTS, SCREENSHOT_PATH, WIDTH)
from drawer import draw_light_sources
from game import init_pygame
from image import load_image, save_image
from light_source import LIGHT_SOURCES, Light
from lighting import apply_lights, apply_lights_copy
from log import compute_metrics, log_metrics, logging_close, logging_init
from scene import load_lights

SIM_DT = 1 / FPS


def make_background(rng, width=WIDTH, height=HEIGHT):
    # Dark noise so the light cones have something to blend into
    noise = rng.integers(0, 40, size=(height, width, 3))
    return np.clip(noise + np.array(BG_COLOR), 0, 255).astype(np.uint8)


def random_light(rng, x=None, y=None):
    if x is None:
        x = rng.uniform(DEFAULT_LIGHT_RADIUS, WIDTH - DEFAULT_LIGHT_RADIUS)
    if y is None:
        y = rng.uniform(DEFAULT_LIGHT_RADIUS, HEIGHT - DEFAULT_LIGHT_RADIUS)
    color = tuple(int(c) for c in rng.integers(40, 256, size=3))
    return Light(x, y, DEFAULT_LIGHT_RADIUS, color, DEFAULT_BRIGHTNESS)


def initial_lights(rng, scene_path=None):
    if scene_path is not None:
        return load_lights(scene_path)
    if LIGHT_SOURCES:
        return list(LIGHT_SOURCES)
    return [random_light(rng) for _ in range(NUM_RANDOM_LIGHTS)]


def render_headless(input_path, output_path, scene_path):
    logging_init()
    image = load_image(input_path)
    before = image.copy()
    lights = load_lights(scene_path)
    apply_lights(image, lights)
    log_metrics(0, 0.0, compute_metrics(before, image, lights))
    save_image(image, output_path)
    return image


def main(_seed = 42, scene_path = None):
    screen, font = init_pygame()
    clock = pygame.time.Clock()
    rng = np.random.default_rng(_seed)

    background = make_background(rng)
    lights = initial_lights(rng, scene_path)

    logging_init()

    frame_count = 0
    total_time = 0.0
    running = True
    paused = False
    overlay = True
    dragging = False
    dirty = True
    lit = background
    frame_surface = pygame.surfarray.make_surface(background.transpose(1, 0, 2))
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and lights:
                dragging = True
                lights[0].move_to(*event.pos)
            elif event.type == pygame.MOUSEMOTION and dragging:
                lights[0].move_to(*event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and dragging:
                dragging = False
                dirty = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_p:
                    paused = not paused
                    print("Paused" if paused else "Resumed")
                elif event.key == pygame.K_SPACE:
                    overlay = not overlay
                    print("Overlay", "enabled" if overlay else "disabled", "at", total_time)
                elif event.key == pygame.K_r:
                    # If shift as well, generate a new seed:
                    if event.mod & (pygame.KMOD_LSHIFT | pygame.KMOD_RSHIFT):
                        _seed = int(rng.integers(0, 100))
                    rng = np.random.default_rng(_seed)
                    background = make_background(rng)
                    lights = initial_lights(rng, scene_path)
                    dirty = True
                elif event.key == pygame.K_l:
                    lights.append(random_light(rng, *pygame.mouse.get_pos()))
                    dirty = True
                elif event.key == pygame.K_s:
                    save_image(lit, SCREENSHOT_PATH)
                    print("Saved", SCREENSHOT_PATH)
                elif event.key == pygame.K_e:
                    running = False

        if not paused:
            total_time += SIM_DT

            if dirty:
                lit = apply_lights_copy(background, lights)
                metrics = compute_metrics(background, lit, lights)
                log_metrics(frame_count, total_time, metrics)
                frame_surface = pygame.surfarray.make_surface(lit.transpose(1, 0, 2))
                dirty = False

            frame_count += 1

        clock.tick(FPS if not paused else 10)
        screen.blit(frame_surface, (0, 0))
        if overlay:
            draw_light_sources(screen, lights)
        if paused:
            txt = font.render("PAUSED", True, (255, 100, 100))
            screen.blit(txt, (10, 10))
        txt = font.render(f"lights: {len(lights)}", True, FONT_COLOR)
        screen.blit(txt, (10, HEIGHT - 20))
        pygame.display.flip()


    pygame.quit()
    logging_close()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Per-pixel light simulator")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--scene", help="JSON file with the lights to use")
    parser.add_argument("--input", help="Light this image and exit instead of opening a window")
    parser.add_argument("--output", default=SCREENSHOT_PATH, help="Where --input writes the lit image")
    args = parser.parse_args()

    if args.input:
        if args.scene is None:
            parser.error("--input needs --scene")
        render_headless(args.input, args.output, args.scene)
    else:
        main(args.seed, args.scene)
