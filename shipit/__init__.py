"""shipit - minimal remote deployment tool"""

__version__ = "1.0.0"
