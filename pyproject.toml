[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osalgos"
version = "0.1.0"
description = "Classic operating-system algorithms: CPU, disk and page scheduling, memory allocation, the banker's algorithm, and process, file and IPC exercises"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "cpu scheduling",
    "disk scheduling",
    "page replacement",
    "bankers algorithm",
    "memory allocation",
    "producer consumer",
    "shared memory",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
osalgos-cpu = "osalgos.cpu_scheduling:main"
osalgos-disk = "osalgos.disk_scheduling:main"
osalgos-paging = "osalgos.paging:main"
osalgos-memory = "osalgos.memory_alloc:main"
osalgos-bankers = "osalgos.bankers:main"
osalgos-prodcons = "osalgos.producer_consumer:main"
osalgos-fileread = "osalgos.files:fileread_main"
osalgos-filestatus = "osalgos.files:filestatus_main"
osalgos-processes = "osalgos.processes:main"
osalgos-chat = "osalgos.chat:main"

[tool.hatch.build.targets.wheel]
packages = ["osalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
