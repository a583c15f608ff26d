# main.py
import time
import pygame
from camera.camera import Camera
from core.color import Color
from core.vector import Vector3
from geometry.background import Background
from geometry.floor import Floor
from geometry.light import Light
from geometry.sphere import Sphere
from geometry.world import World
from materials.material import Material
from materials.presets import ColorPresets, MaterialPresets
from renderer.raytracer import Renderer

WINDOW_SIZE = 640
WORKERS = 4

class Application:
    def __init__(self, width: int = WINDOW_SIZE, height: int = WINDOW_SIZE, workers: int = WORKERS):
        self.width = width
        self.height = height
        self.camera = Camera(aspect_ratio=width / height)
        self.renderer = Renderer(width, height, workers=workers)
        self.world = self.create_world()
        self.screen = None

    def create_world(self) -> World:
        """
        Two spheres, a mirror and a glass one, above a checkered floor.
        """
        world = World(Background(ColorPresets.SKY))

        print("\n=== Creating World ===")
        world.add(Sphere(
            Vector3(-0.87, -0.5, 2.25),
            0.45,
            MaterialPresets.mirror(ColorPresets.GREY)
        ))
        print("Added mirror sphere at (-0.87, -0.5, 2.25) with radius 0.45")

        world.add(Sphere(
            Vector3(0.0, 0.0, 1.5),
            0.5,
            MaterialPresets.glass(refraction_index=0.95)
        ))
        print("Added glass sphere at (0, 0, 1.5) with radius 0.5")

        floor = Floor(
            Vector3(-2.0, -2.0, 0.0),
            Vector3(-2.0, 2.0, 0.0),
            Vector3(2.0, 2.0, 0.0),
            Vector3(2.0, -2.0, 0.0),
            Material(ColorPresets.RED),
            Material(ColorPresets.YELLOW)
        )
        world.add(floor.rotate_x(65.0).translate(Vector3(-1.0, -1.25, 2.0)))
        print("Added checkered floor rotated 65 degrees about X")

        world.add_light(Light(Vector3(2.0, 3.0, -4.0), Color(255, 255, 255)))
        print(f"World contains {len(world)} shapes and {len(world.lights)} lights")
        return world

    def run(self):
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Ray Tracer")

        frame = self.renderer.render(self.camera, self.world)

        start = time.perf_counter()
        frame_surface = pygame.surfarray.make_surface(frame)
        self.screen.blit(frame_surface, (0, 0))
        pygame.display.flip()
        print(f"Time to display result: {(time.perf_counter() - start) * 1000:.0f} ms")

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)

def main():
    app = Application()

    try:
        app.run()
    except Exception as e:
        print(f"Error during execution: {e}")
        import traceback
        traceback.print_exc()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
