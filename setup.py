from setuptools import find_packages, setup


def read_requirements():
    try:
        with open("requirements.txt", "r") as f:
            return [
                line.strip() for line in f if line.strip() and not line.startswith("#")
            ]
    except FileNotFoundError:
        return []


setup(
    name="BoldDeskAttachmentCleanup",
    version="0.1.0",
    description="Retention cleanup of attachments on closed helpdesk tickets",
    author="Inine",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    py_modules=["main"],
    python_requires=">=3.11",
    install_requires=read_requirements(),
    extras_require={"test": ["pytest>=8.0", "respx>=0.21"]},
    entry_points={"console_scripts": ["attachment-cleanup=main:main"]},
)
