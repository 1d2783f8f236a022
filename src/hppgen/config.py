# src/hppgen/config.py

DEFAULT_INTERFACE_DIR = "includes"
DEFAULT_IMPLEMENTATION_DIR = "src"

INTERFACE_EXTENSION = ".h"
IMPLEMENTATION_EXTENSION = ".cpp"

DEFAULT_OUTPUT = "cclip.hpp"
DEFAULT_VERSION = "0.0.8"
DEFAULT_VERSION_MACRO = "CCLIP_VERSION"

COMPILE_ONCE_DIRECTIVE = "#pragma once"

# gitignore-style exclusions, looked up in the working directory
IGNORE_FILENAME = ".hppgenignore"

LEGAL_HEADER = """/**
    This file is part of the CClip project, a simple and convenient library for handling command line arguments in C++ applications. 
    The primary purpose of CClip is to make the parsing of command-line options easier, providing a structured and consistent way to manage command-line inputs. 
    It enables developers to define specific command-line options and arguments that their applications can accept. Once these options are defined, CClip allows them to be easily parsed and retrieved when the application is run, reducing the complexity associated with command-line input handling. 
    The parsing functionality provided by CClip is intuitive and efficient, making it an ideal choice for any C++ application that requires command-line input functionality.
    For more information please visit our github page at https://github.com/Drew-Chase/cclip
*/"""
