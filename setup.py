from setuptools import find_packages, setup

setup(
  name="edsign",
  author="Edsign developers",
  description="Ed25519 signatures (RFC 8032) in plain Python, with a CLI",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  version="0.1.0",
  packages=find_packages(exclude=["tests", "tests.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  install_requires=[
    "colorama>=0.4",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "pynacl>=1.4", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  include_package_data=True,
  entry_points=dict(
    console_scripts=["edsign = edsign.__main__:main"],
  ),
)
