"""
Blog Post Model
"""

from datetime import datetime

from blogsite.extensions import db


class Blog(db.Model):
    """A single blog post owned by its creator"""
    __tablename__ = 'blogs'
    
    blog_id = db.Column(db.Integer, primary_key=True)
    creator_user_id = db.Column(db.String(80), db.ForeignKey('users.user_id'), nullable=False, index=True)
    creator_name = db.Column(db.String(120), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)
    category_id = db.Column(db.Integer, db.ForeignKey('categories.category_id'), nullable=False)
    date_created = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    date_modified = db.Column(db.DateTime)
    
    @property
    def id(self):
        return self.blog_id
    
    @property
    def author(self):
        return self.creator_name
    
    def is_owned_by(self, user_id):
        return self.creator_user_id == user_id
    
    def __repr__(self):
        return f'<Blog {self.blog_id} by {self.creator_user_id}>'
