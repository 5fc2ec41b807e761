[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osalgo"
version = "0.1.0"
description = "Classic operating-system algorithms: CPU scheduling, Banker's safety check, memory fits, page replacement, dining philosophers and producer-consumer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-systems",
    "scheduling",
    "bankers-algorithm",
    "page-replacement",
    "memory-allocation",
    "producer-consumer",
    "dining-philosophers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osalgo-fcfs = "osalgo.scheduling:main_fcfs"
osalgo-priority = "osalgo.scheduling:main_priority"
osalgo-bankers = "osalgo.bankers:main"
osalgo-fit = "osalgo.memory_fit:main"
osalgo-paging = "osalgo.paging:main"
osalgo-dining = "osalgo.dining:main"
osalgo-prodcons = "osalgo.producer_consumer:main"

[tool.hatch.build.targets.wheel]
packages = ["osalgo"]

[tool.pytest.ini_options]
addopts = "-ra"
