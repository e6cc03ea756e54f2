from .classlist import active_classes, class_string, class_attr, merge_entries
from .html import render_tag
