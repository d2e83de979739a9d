"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='postfix-calc',
	version='0.1.0',
	packages=['postfix', ],
	entry_points={
		'console_scripts': ["postfix = postfix.cmdline:main"],
	},
	license='MIT',
	description='A small postfix (reverse Polish) calculator language with variables and side-channel arguments',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
		"numpy>=1.21",
	],
	extras_require={
		'test': ["pytest"],
	},
)
