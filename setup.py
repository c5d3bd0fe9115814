from glob import glob
from setuptools import setup


setup(
    name='rpneval',
    use_scm_version={
        # Building outside a git checkout.
        'fallback_version': '0.1.0',
    },
    description='RPN expression evaluator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['rpneval'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
