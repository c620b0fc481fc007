import os
from setuptools import setup, find_packages

BASE_DIR = os.path.dirname(__file__)
REQS_PATH = os.path.join(BASE_DIR, 'requirements.txt')

with open(REQS_PATH, "r") as reqs_file:
    install_requires = [
        line.strip().split('==', maxsplit=1)[0]
        for line in reqs_file
        if line.strip()
    ]

setup(
    name='ed25519key',
    version='1.0.0',
    description='Ed25519 key generation and PKCS8/SubjectPublicKeyInfo '
                'PEM and DER serialization',
    python_requires='>=3.7',

    classifiers=[
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Topic :: Security :: Cryptography',
        'Topic :: Utilities'
    ],
    packages=find_packages(exclude=['test']),
    test_suite='test',

    install_requires=install_requires,
)
