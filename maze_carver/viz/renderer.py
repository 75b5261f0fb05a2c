import pygame
from maze_carver.core.errors import MazeError
from maze_carver.core.session import MazeSession
from maze_carver.viz.view import MazeView

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_VISITED = (60, 100, 160)# Blue tint
    COLOR_CURRENT = (255, 215, 0)# Gold
    COLOR_PREVIOUS = (200, 80, 60)

    def __init__(self, session: MazeSession, width=1280, height=720, record=False, steps_per_frame=1000):
        self.session = session
        # Zero-delay runs would otherwise carve the whole maze inside one frame
        session.scheduler.max_steps_per_tick = steps_per_frame
        self.screen_width = width
        self.screen_height = height

        self.view = MazeView(clock=session.scheduler.clock)
        session.scheduler.add_listener(self.view)

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0

        from maze_carver.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.error = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        if not self.view.width or not self.view.height:
            return
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w / self.view.width, available_h / self.view.height)

        total_maze_w = self.view.width * self.cell_size
        total_maze_h = self.view.height * self.cell_size
        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Carver - {self.session.config.width}x{self.session.config.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def world_to_screen(self, wx, wy):
        # Maze y grows upward, screen y grows downward
        sx = wx * self.cell_size + self.offset_x
        sy = (self.view.height - wy) * self.cell_size + self.offset_y
        return sx, sy

    def regenerate(self):
        try:
            self.session.regenerate()
            self.error = None
        except MazeError as e:
            self.error = str(e)
        self.fit_to_screen()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    self.regenerate()

    def draw_maze(self):
        self.surface.fill(self.COLOR_BG)
        size = int(self.cell_size) + 1

        for (x, y) in self.view.visited:
            px, py = self.world_to_screen(x, y + 1)
            pygame.draw.rect(self.surface, self.COLOR_VISITED, (int(px), int(py), size, size))

        for a, b in self.view.wall_segments():
            pygame.draw.line(self.surface, self.COLOR_WALL, self.world_to_screen(*a), self.world_to_screen(*b), 1)

        outer = [self.world_to_screen(*p) for p in self.view.outer_walls()]
        pygame.draw.lines(self.surface, self.COLOR_WALL, False, outer, 1)

        if not self.view.finished:
            radius = max(2, int(self.cell_size * 0.3))
            current, previous = self.view.markers()
            pygame.draw.circle(self.surface, self.COLOR_PREVIOUS, self.world_to_screen(*previous), radius)
            pygame.draw.circle(self.surface, self.COLOR_CURRENT, self.world_to_screen(*current), radius)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        status = "Done" if self.view.finished else "Carving"
        info = [
            f"FPS: {fps}",
            f"Size: {self.view.width}x{self.view.height}",
            f"Steps: {self.view.steps}/{max(self.view.width * self.view.height - 1, 0)}",
            f"Delay: {self.view.step_delay:.3f}s",
            f"Status: {status}",
            "R: regenerate  Esc: quit",
            "REC" if self.recorder.active else "",
        ]
        if self.error:
            info.append(f"Error: {self.error}")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.session.tick()

            self.draw_maze()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(60)

        self.session.scheduler.cancel()
        self.recorder.stop()
        pygame.quit()
