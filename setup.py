from setuptools import setup, find_packages


with open('README.rst', 'r') as f:
    README = f.read()


setup(name='mpdproto',
      version='0.1.0',
      description='MPD (Music Player Daemon) protocol client for asyncio',
      long_description=README,
      classifiers=[
          "License :: OSI Approved :: BSD License",
          "Operating System :: POSIX",
          "Programming Language :: Python :: 3",
          "Topic :: System :: Networking",
          "Topic :: Multimedia :: Sound/Audio",
          "Topic :: Software Development :: Libraries :: Python Modules",
          "Development Status :: 4 - Beta",
      ],
      keywords=['mpd', 'asyncio'],
      packages=find_packages(exclude=['tests']),
      python_requires='>=3.7',
      extras_require={
          'test': ['pytest', 'pytest-asyncio'],
      },
      )
