from setuptools import setup, find_packages

setup(
    name="power2lms",
    packages=find_packages(
        include=["power2lms", "power2lms.*"]),
    version='0.1.0',
    description="Power-of-Two Error LMS adaptive FIR filtering in Python.",
    keywords=["Adaptive", "Filtering", "LMS", "Power-of-Two", "Digital", "Signal", "Processing"],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': [
            'pytest',
            'scipy',
        ],
    },

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3'
    ]

)
