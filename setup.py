from setuptools import setup


LONG_DESC = """
acceptlang negotiates which of the languages your application supports
should be used to answer a client. Give it your supported BCP 47 language
tags, such as 'en-US', 'fr' and 'zh-Hant', and the client's weighted
priority list from an Accept-Language header, and it returns the best
supported tag, never one that is more specific than what was asked for.
"""


setup(
    name="acceptlang",
    version='1.0.0',
    license="MIT",
    platforms=["any"],
    description="Negotiates a supported language from an Accept-Language priority list",
    long_description=LONG_DESC,
    packages=['acceptlang'],
    include_package_data=True,
    install_requires=[],
    python_requires='>=3.6',
    tests_require=['pytest'],
    extras_require={
        'test': ['pytest']
    },
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
