import io
import tempfile
import unittest
from pathlib import Path

from PIL import Image

from labyrinth import Renderer
from labyrinth.maze import (
    CellState,
    GenerationAlgorithm,
    ImageRenderer,
    Maze,
    MazeGenerator,
    MazeSolver,
    SolveStrategy,
    TextRenderer,
)
from labyrinth.maze.render import END_COLOR, PATH_COLOR, START_COLOR, WALL_COLOR


class TextRendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self.stream = io.StringIO()
        self.keys = io.StringIO("\n")
        self.renderer = TextRenderer(self.stream, self.keys, clear=False)

    def test_draw_writes_one_symbol_per_cell(self) -> None:
        maze = Maze.from_rows(["S.#", ",*E"])
        self.renderer.draw(maze)
        self.assertEqual(self.stream.getvalue(), "S.#\n,*E\n")

    def test_message_and_key(self) -> None:
        self.renderer.message("Finished")
        self.renderer.await_key()
        self.assertEqual(self.stream.getvalue(), "Finished\n")
        self.assertEqual(self.keys.read(), "")

    def test_clearing_frames(self) -> None:
        renderer = TextRenderer(self.stream, self.keys)
        with renderer:
            renderer.draw(Maze.from_rows(["SE"]), 0)
        self.assertTrue(self.stream.getvalue().startswith("\x1b[2J\x1b[H"))
        self.assertIn("SE\n", self.stream.getvalue())

    def test_drives_a_full_generation_run(self) -> None:
        generator = MazeGenerator(5, 5, seed=1, renderer=self.renderer, draw_delay=0.0)
        maze = generator.generate(GenerationAlgorithm.DFS, animate=True)
        output = self.stream.getvalue()
        self.assertIn(str(maze), output)
        self.assertIn("Finished generation", output)


class ImageRendererTests(unittest.TestCase):
    def test_render_scales_cells(self) -> None:
        renderer = ImageRenderer(cell_size=4)
        image = renderer.render(Maze.from_rows(["S#", "*E"]))
        self.assertEqual(image.size, (8, 8))
        self.assertEqual(image.getpixel((1, 1)), START_COLOR)
        self.assertEqual(image.getpixel((5, 1)), WALL_COLOR)
        self.assertEqual(image.getpixel((1, 5)), PATH_COLOR)
        self.assertEqual(image.getpixel((5, 5)), END_COLOR)

    def test_frames_follow_a_solver_run(self) -> None:
        renderer = ImageRenderer(cell_size=2)
        maze = MazeGenerator(7, 7, seed=2).generate()
        MazeSolver(maze, renderer=renderer, draw_delay=0.01).solve(SolveStrategy.BFS, animate=True)
        self.assertGreater(len(renderer.frames), 1)
        self.assertEqual(len(renderer.frames), len(renderer.durations))
        self.assertEqual(renderer.last_frame.size, (14, 14))
        self.assertEqual(renderer.messages[-1][:7], "Solved!")

    def test_save_animation(self) -> None:
        renderer = ImageRenderer(cell_size=3)
        MazeGenerator(5, 7, seed=3, renderer=renderer, draw_delay=0.0).generate(
            GenerationAlgorithm.KRUSKALS, animate=True
        )
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "run.gif"
            renderer.save_animation(path)
            with Image.open(path) as image:
                self.assertEqual(image.size, (21, 15))
                self.assertGreater(getattr(image, "n_frames", 1), 1)

    def test_save_without_frames_fails(self) -> None:
        with self.assertRaises(ValueError):
            ImageRenderer().save_animation("unused.gif")

    def test_invalid_cell_size(self) -> None:
        with self.assertRaises(ValueError):
            ImageRenderer(cell_size=0)


class RendererContractTests(unittest.TestCase):
    def test_draw_is_abstract(self) -> None:
        with self.assertRaises(TypeError):
            Renderer()

    def test_every_state_has_a_distinct_colour(self) -> None:
        renderer = ImageRenderer(cell_size=1)
        maze = Maze.from_rows(["".join(state.symbol for state in CellState)])
        image = renderer.render(maze)
        colours = {image.getpixel((c, 0)) for c in range(len(CellState))}
        self.assertEqual(len(colours), 7)


if __name__ == "__main__":
    unittest.main()
