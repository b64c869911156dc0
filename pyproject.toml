[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadedemos"
version = "0.1.0"
description = "Small interactive pygame demos: snake, star field, sine tone, typewriter, sprites, touch gestures, squirals, tiles, UI widgets, text input and window settings"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["games", "demos", "pygame", "snake", "sprites", "ui", "animation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arcadedemos-snake = "arcadedemos.snake:main"
arcadedemos-stars = "arcadedemos.stars:main"
arcadedemos-sinewave = "arcadedemos.sinewave:main"
arcadedemos-typewriter = "arcadedemos.typewriter:main"
arcadedemos-sprites = "arcadedemos.sprites:main"
arcadedemos-touch = "arcadedemos.touch:main"
arcadedemos-squiral = "arcadedemos.squiral:main"
arcadedemos-tiles = "arcadedemos.tiles:main"
arcadedemos-ui = "arcadedemos.ui:main"
arcadedemos-textinput = "arcadedemos.textinput:main"
arcadedemos-windowclosing = "arcadedemos.windowclosing:main"
arcadedemos-windowsize = "arcadedemos.windowsize:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadedemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
