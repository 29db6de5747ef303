from setuptools import setup, find_packages

with open('README.md', 'r') as readme:
    long_description = readme.read()

setup(
    name='nurbsketch', 
    version='1.0.0', 
    description='Rational Bézier and B-spline curve evaluation for 2D sketching tools.', 
    long_description=long_description, 
    long_description_content_type='text/markdown', 
    packages=find_packages(exclude=['tests', 'tests.*']), 
    python_requires='>=3.9', 
    install_requires=['numpy', 'numba', 'scipy', 'matplotlib'], 
    extras_require={'test': ['pytest']}, 
    classifiers=['Programming Language :: Python :: 3', 
                 'Operating System :: OS Independent'], 
    
)
