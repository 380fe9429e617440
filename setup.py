from setuptools import setup, find_packages

setup(
    name='jsondatafile',
    version="0.1.0",
    description='JSON object stored in a file, saved on every change',
    url='http://github.com/daltonserey/jsondatafile',
    author='Dalton Serey',
    author_email='daltonserey@gmail.com',
    maintainer='Dalton Serey',
    maintainer_email='daltonserey@gmail.com',
    license='MIT',
    packages=find_packages(),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'pyyaml>=5.4.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False
)
