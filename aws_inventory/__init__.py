"""AWS Infrastructure Inventory Tool."""

__version__ = "1.0.0"
__description__ = "AWS Infrastructure Inventory Tool - A comprehensive tool for listing and analyzing AWS resources"
__homepage__ = "https://github.com/yourusername/aws-inventory"
