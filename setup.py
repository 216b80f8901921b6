from setuptools import setup, find_namespace_packages
import os

def read_readme():
    path = os.path.join(os.path.dirname(__file__), 'README.md')
    with open(path, encoding='utf-8') as f:
        return f.read()

setup(
    name='pomodoro-desk',
    version='0.1.0',
    description='A desktop Pomodoro timer with separate work and break countdowns',
    long_description=read_readme() if os.path.exists('README.md') else '',
    long_description_content_type='text/markdown',
    packages=find_namespace_packages(include=['pomodoro_desk', 'pomodoro_desk.*']),
    python_requires='>=3.9',
    install_requires=[
        'PyQt6',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Environment :: X11 Applications :: Qt',
        'Development Status :: 3 - Alpha',
        'Intended Audience :: End Users/Desktop',
        'Topic :: Office/Business :: Scheduling',
    ],
    entry_points={
        'gui_scripts': [
            'pomodoro-desk = pomodoro_desk.main_qt:main',
        ],
    },
)
