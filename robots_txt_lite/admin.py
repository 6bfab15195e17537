"""Admin configuration for robots_txt_lite."""
from django.contrib import admin

from .models import Option


@admin.register(Option)
class OptionAdmin(admin.ModelAdmin):
    """Admin interface configuration for stored options."""
    list_display = ('name', 'updated_at')
    search_fields = ('name',)
    readonly_fields = ('updated_at',)
