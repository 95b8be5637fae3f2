import uuid

import django.core.validators
import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(db_index=True, default='bicycle', max_length=100, verbose_name='Product type')),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('price', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(0)], verbose_name='Base price')),
                ('is_available', models.BooleanField(default=False, verbose_name='Available for sale')),
                ('restrictions', models.JSONField(blank=True, default=None, null=True, verbose_name='Restrictions')),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'db_table': 'products',
                'ordering': ['type', 'name'],
            },
        ),
        migrations.CreateModel(
            name='Part',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_type', models.CharField(db_index=True, default='bicycle', max_length=100, verbose_name='Product type')),
                ('category', models.CharField(max_length=100, verbose_name='Category')),
                ('value', models.CharField(max_length=255, verbose_name='Value')),
                ('price', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(0)], verbose_name='Price')),
                ('quantity', models.IntegerField(default=0, validators=[django.core.validators.MinValueValidator(0)], verbose_name='Stock quantity')),
                ('is_available', models.BooleanField(default=True, verbose_name='Available')),
            ],
            options={
                'verbose_name': 'Part',
                'verbose_name_plural': 'Parts',
                'db_table': 'parts',
                'ordering': ['product_type', 'category', 'value'],
                'indexes': [models.Index(fields=['product_type', 'category'], name='parts_product_d6a0b1_idx')],
            },
        ),
        migrations.AddConstraint(
            model_name='part',
            constraint=models.UniqueConstraint(fields=('category', 'value', 'product_type'), name='unique_part_per_product_type'),
        ),
        migrations.CreateModel(
            name='HistoricalPart',
            fields=[
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Updated at')),
                ('id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, verbose_name='ID')),
                ('product_type', models.CharField(db_index=True, default='bicycle', max_length=100, verbose_name='Product type')),
                ('category', models.CharField(max_length=100, verbose_name='Category')),
                ('value', models.CharField(max_length=255, verbose_name='Value')),
                ('price', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(0)], verbose_name='Price')),
                ('quantity', models.IntegerField(default=0, validators=[django.core.validators.MinValueValidator(0)], verbose_name='Stock quantity')),
                ('is_available', models.BooleanField(default=True, verbose_name='Available')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'historical Part',
                'verbose_name_plural': 'historical Parts',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='CustomProduct',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_type', models.CharField(db_index=True, default='bicycle', max_length=100, verbose_name='Product type')),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('price', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(0)], verbose_name='Price')),
                ('version', models.PositiveIntegerField(default=1, verbose_name='Version')),
            ],
            options={
                'verbose_name': 'Custom product',
                'verbose_name_plural': 'Custom products',
                'db_table': 'custom_products',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='CustomProductPart',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('position', models.PositiveIntegerField(default=0, verbose_name='Position')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Attached at')),
                ('custom_product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='part_links', to='persistence.customproduct', verbose_name='Custom product')),
                ('part', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='custom_product_links', to='persistence.part', verbose_name='Part')),
            ],
            options={
                'verbose_name': 'Custom product part',
                'verbose_name_plural': 'Custom product parts',
                'db_table': 'custom_product_parts',
                'ordering': ['position'],
            },
        ),
        migrations.AddConstraint(
            model_name='customproductpart',
            constraint=models.UniqueConstraint(fields=('custom_product', 'part'), name='unique_part_per_custom_product'),
        ),
        migrations.AddField(
            model_name='customproduct',
            name='parts',
            field=models.ManyToManyField(blank=True, related_name='custom_products', through='persistence.CustomProductPart', to='persistence.part', verbose_name='Parts'),
        ),
    ]
