#!/usr/bin/env python3
"""
Setup script for the Virtual Pet gesture core
"""

from pathlib import Path

from setuptools import find_packages, setup


def read_requirements():
    """Read runtime requirements from requirements.txt"""
    path = Path(__file__).parent / "requirements.txt"
    return [
        line.strip()
        for line in path.read_text().splitlines()
        if line.strip() and not line.startswith("#")
    ]


setup(
    name="virtual-pet-gestures",
    version="0.1.0",
    description="Hand-landmark gesture classification and interaction state machine for a virtual pet",
    packages=find_packages(include=["virtualpet", "virtualpet.*"]),
    package_data={"virtualpet": ["config.default.yaml"]},
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={
        "camera": ["opencv-python>=4.8", "mediapipe>=0.10"],
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["virtual-pet=virtualpet.main:cli"],
    },
)
