
from setuptools import find_packages, setup

setup(
      name="pixel_remap",
      version = "1.0.0",
      packages=find_packages(exclude=["tests", "tests.*"]),

      python_requires=">=3.9",
      install_requires = ['numpy>=1.20', 'scipy>=1.7'],
      extras_require = {
        'test': ['pytest>=7.0'],
      },

      package_data = {
        'pixel_remap': ['*.ini']
      },

      entry_points = {
        'console_scripts': [
          'pixel-remap=pixel_remap.run_pixel_remap:cli',
        ],
      },

      zip_safe = False,

      description="Raster rotation with nearest/bilinear/bicubic interpolation and FFT convolution",
      license = "BSD",
      platforms=["any"],
      url="",
)
