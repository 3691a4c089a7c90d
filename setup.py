from setuptools import find_packages, setup

PROJECTS = {
    "pull-sdk": "pull_sdk",
    "pull-utils": "pull_utils",
    "proof-pusher": "proof_pusher",
}

packages = []
package_dir = {}
for directory, package in PROJECTS.items():
    package_dir[package] = f"{directory}/{package}"
    for found in find_packages(where=directory, include=[package, f"{package}.*"]):
        packages.append(found)

setup(
    name="pull-oracle-sdk",
    version="0.1.0",
    description="Pull oracle proofs and verify them on EVM, Aptos, Sui, Radix & CosmWasm chains",
    python_requires=">=3.11",
    packages=packages,
    package_dir=package_dir,
    entry_points={
        "console_scripts": [
            "proof-pusher=proof_pusher.main:cli_entrypoint",
        ],
    },
    install_requires=[
        "aiohttp>=3.9,<3.14",
        "yarl>=1.9",
        "pydantic>=2.5",
        "typing_extensions>=4.8",
        "asgiref>=3.7",
        "web3>=7.0",
        "eth-account>=0.13",
        "click>=8.1",
        "pyyaml>=6.0",
        "boto3>=1.28",
    ],
    extras_require={
        "test": [
            "pytest>=7.4,<9",
            "pytest-asyncio>=0.23",
            "aioresponses>=0.7.6",
        ],
    },
)
