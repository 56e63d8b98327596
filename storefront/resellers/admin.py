from django.contrib import admin

from storefront.resellers.models import Reseller


@admin.register(Reseller)
class ResellerAdmin(admin.ModelAdmin):
    list_display = ('domain', 'name', 'theme')
    search_fields = ('domain', 'name')
