from setuptools import setup

package_data = {
    "cmprlib": ["logging.conf", "config.yaml"],
}

setup(
    name="cmpr",
    version="0.1.0",
    description="Command line front end for a file compression engine",
    packages=["cmprlib"],
    py_modules=["cmpr"],
    package_data=package_data,
    install_requires=["pyyaml", "tqdm"],
    entry_points={"console_scripts": ["cmpr=cmpr:console_main"]},
)
