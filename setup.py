from setuptools import setup, find_packages

setup(
    name="rumtopf",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "rumtopf.static_site": [
            "l10n.json",
            "templates/*.html",
            "templates/*.css",
            "templates/*.js",
        ],
    },
    description="A generator for static, multi-language recipe websites.",
    install_requires=["marko>=2.0", "jinja2>=3.0"],
    extras_require={"test": ["pytest", "lxml"]},
    entry_points={
        "console_scripts": [
            "rumtopf=rumtopf.scripts.rumtopf:main",
        ],
    },
)
