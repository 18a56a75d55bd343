"""
Category Model
"""

from blogsite.extensions import db


class Category(db.Model):
    """Named grouping for posts, created the first time a post uses it"""
    __tablename__ = 'categories'
    
    category_id = db.Column(db.Integer, primary_key=True)
    category_name = db.Column(db.String(100), unique=True, nullable=False)
    
    blogs = db.relationship('Blog', backref='category', lazy=True)
    
    def __repr__(self):
        return f'<Category {self.category_name}>'
