import io
import os.path
import re

from setuptools import setup, find_packages

# We want the value of ``turkstem.__version__``. However, we cannot
# simply ``import turkstem`` since turkstem requires pyparsing which
# might not be installed. Hence we extract the version information
# "manually".
module_dir = os.path.dirname(__file__)
init_filename = os.path.join(module_dir, 'turkstem', '__init__.py')
with io.open(init_filename, 'r', encoding='utf8') as f:
    for line in f:
        m = re.match(r'\s*__version__\s*=\s*[\'"](.*)[\'"]\s*', line)
        if m:
            version = m.group(1)
            break
    else:
        raise Exception('Could not find version number.')

setup(
    name='turkstem',
    version=version,
    description='A state machine based stemmer for Turkish',
    author='The turkstem developers',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Text Processing :: Linguistic',
        'Natural Language :: Turkish',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent ',
    ],
    keywords='stemmer turkish morphology',
    packages=find_packages(exclude=['test']),
    package_data={'turkstem': ['data/*.txt']},
    python_requires='>=3.6',
    install_requires=['pyparsing >= 3.0'],
    extras_require={'test': ['pytest']},
    platforms=['any'],
    entry_points={'console_scripts':['turkstem=turkstem.__main__:main']},
)
