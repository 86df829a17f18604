APP_NAME = "DirTreePy"
__version__ = "1.3.0"
