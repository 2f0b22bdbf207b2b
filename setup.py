from setuptools import find_packages, setup

setup(
    name="recent-folders",
    version="0.1.0",
    description="Recent Folders - ranked shortcuts to your most recently used folders",
    packages=find_packages(include=["recent_folders", "recent_folders.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "watchdog",  # File system monitoring
        "pydantic>=2",  # Config validation
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pywin32; sys_platform == 'win32'",  # .lnk shortcuts and file attributes
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
    },
    entry_points={
        "console_scripts": [
            "recent-folders=recent_folders.cli:main",
        ],
    },
)
