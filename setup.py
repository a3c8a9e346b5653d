from setuptools import setup, find_namespace_packages

setup(
    name="doc_summarizer",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["doc_summarizer*"]),
    package_data={"doc_summarizer": ["prompts/*.json", "prompts/*.template.txt"]},
    python_requires=">=3.10",
    install_requires=[
        "openai",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "doc-summarizer=doc_summarizer.main:main",
        ],
    },
)
