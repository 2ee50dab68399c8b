from setuptools import setup, find_packages

setup(
    name="circlens",
    version="1.0.0",
    description="Real-time single circle detection with a gradient Hough transform",
    author="Circlens",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "opencv-python>=4.8.0",
        "numpy>=1.24.0",
        "scipy>=1.10.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    python_requires=">=3.9",
)
