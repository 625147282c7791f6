"""Grid mazes: generation, solving, file storage and curses animation."""