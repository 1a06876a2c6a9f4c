# Copyright 2024 Bytedance Ltd. and/or its affiliates
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from setuptools import find_packages, setup

setup(
    name="takuzu",
    version="0.1.0",
    description="Takuzu (binary puzzle) validator, solver and puzzle bootcamp",
    long_description=open("README.md", encoding="utf-8").read() if __import__("pathlib").Path("README.md").exists() else "",
    long_description_content_type="text/markdown",
    author="takuzu Team",
    license="Apache-2.0",
    packages=find_packages(where=".", include=["takuzu", "takuzu.*"]),
    package_dir={"": "."},
    python_requires=">=3.10",
    install_requires=[
        "pyyaml",
        "jsonlines",
        "tqdm",
        "numpy",
        "Pillow",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "takuzu=takuzu.cli:main",
            "takuzu-generate=takuzu.utils.data_generation:main",
        ],
    },
    include_package_data=True,
)
