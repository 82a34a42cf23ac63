from setuptools import setup, find_namespace_packages

setup(
    name="deepl_client",
    version="1.0.0",
    packages=find_namespace_packages(include=["deepl_client", "deepl_client.*"]),
    entry_points={
        'console_scripts': [
            'deepl=deepl_client.cli:main',
        ],
    },
    install_requires=[
        "requests",
        "colorama",
    ],
)
